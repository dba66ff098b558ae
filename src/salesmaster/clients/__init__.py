"""Clients for services salesmaster depends on but does not own."""
