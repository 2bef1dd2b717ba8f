"""Configuration for Simple-Cache."""
