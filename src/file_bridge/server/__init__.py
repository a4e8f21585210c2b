"""ASGI request pipeline — dispatch, error mapping and response sending."""
