"""Delivery mechanisms. Only HTTP (Flask) is provided."""
