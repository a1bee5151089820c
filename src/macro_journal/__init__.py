"""Multi-user nutrition journal backed by Supabase."""
