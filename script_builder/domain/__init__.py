"""Domain types shared by the service modules."""
