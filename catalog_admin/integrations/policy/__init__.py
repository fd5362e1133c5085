"""Normalization of backend responses into contract records."""
