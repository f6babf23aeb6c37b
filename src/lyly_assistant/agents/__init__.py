"""Single-purpose LLM helpers behind the auxiliary endpoints."""
