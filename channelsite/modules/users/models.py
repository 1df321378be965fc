# Supabase Auth: auth.users
# No local table is read; users are listed and deleted through the
# auth admin API with the service role key.

"""
Fields rendered per user (from auth.users):
- id: uuid
- email: text
- created_at: timestamp
- last_sign_in_at: timestamp (nullable)
- email_confirmed_at: timestamp (nullable)

There is no create/update path besides the invite stub.
"""
