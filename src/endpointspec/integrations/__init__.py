"""Endpoint catalogs for third-party APIs"""
