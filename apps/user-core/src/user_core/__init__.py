"""Domain library for the Hanacaraka user API."""
