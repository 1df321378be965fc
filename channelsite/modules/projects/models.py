# Supabase table: projects
# This file documents the expected database schema
# Actual operations are handled via the BackendGateway in channelsite.database.gateway

"""
Expected Supabase table structure:

projects:
- id: uuid (primary key)
- name: text (not null)
- description: text (nullable)
- status: text (not null) - values: draft, review, approved, rejected
- channel_name: text (nullable)
- channel_url: text (nullable)
- channel_logo: text (nullable)
- website_url: text (nullable)
- user_id: uuid (not null) - creator who submitted the project
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())

Status changes are admin actions; any status may be set from any status.
"""
