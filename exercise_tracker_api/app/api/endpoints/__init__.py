"""Domain routers: users, exercises and logs."""
