"""Configuration for the tag governance service."""
