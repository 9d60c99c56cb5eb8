"""Hanacaraka user REST API."""
