# Supabase tables: ai_api_keys, youtube_api_keys, github_tokens, netlify_api_keys, api_keys
# This file documents the expected database schema
# Actual operations are handled via the BackendGateway in channelsite.database.gateway

"""
Expected Supabase table structure:

ai_api_keys:
- id: uuid (primary key)
- provider: text (not null) - openai, groq, openrouter, together, anthropic, cohere
- name: text (not null) - unique per provider, from generate_unique_provider_name()
- display_name: text (not null)
- api_key: text (not null)
- model: text (nullable)
- enabled: boolean (default: true)
- requests_used: integer (nullable, default: 0)
- requests_limit: integer (nullable)
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())

youtube_api_keys:
- id, name, api_key, enabled, created_at, updated_at
- quota_used: integer (nullable)
- quota_limit: integer (nullable)

github_tokens:
- id, name, token, enabled, created_at, updated_at
- username, repo_name, repo_url, last_commit: text (nullable)
- commits_count: integer (nullable)

netlify_api_keys:
- id, name, api_key, enabled, created_at, updated_at
- site_id, site_name, site_url, last_deployment: text (nullable)
- deployments_count: integer (nullable)

api_keys:
- id, name, provider, key_value, enabled, created_at, updated_at

Usage counters (requests_used, quota_used, commits_count, deployments_count)
are written by backend processes only; the dashboard never sends them.

Remote procedure:
- generate_unique_provider_name(provider_type text) returns text
"""
