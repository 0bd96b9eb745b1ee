"""Warden - credential and session lifecycle service."""
