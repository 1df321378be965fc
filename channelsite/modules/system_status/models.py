# Supabase table: system_status
# Rows are upserted by a backend process, one per monitored service.
# The dashboard only reads them (and can ask the backend to re-check).

"""
Expected Supabase table structure:

system_status:
- id: uuid (primary key)
- service: text (not null) - e.g. youtube, openai, github, netlify
- status: boolean (default: true) - true means reachable
- last_checked: timestamp (default: now())
- response_time: integer (nullable) - milliseconds
- error_message: text (nullable)

Remote procedure:
- update_system_status() - re-checks every service and upserts the rows
"""
