# Supabase tables: deployments, audit_logs
# Both are written by backend processes; the dashboard only lists them.

"""
Expected Supabase table structure:

deployments:
- id: uuid (primary key)
- project_id: uuid (nullable, foreign key to projects.id)
- status: text (not null)
- url: text (nullable)
- commit_hash: text (nullable)
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())

audit_logs:
- id: uuid (primary key)
- action: text (not null)
- user_id: uuid (nullable)
- resource_type: text (nullable)
- resource_id: text (nullable)
- details: jsonb (nullable)
- ip_address: inet (nullable)
- user_agent: text (nullable)
- created_at: timestamp (default: now())
"""
