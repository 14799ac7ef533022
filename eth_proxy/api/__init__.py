"""
eth-proxy HTTP API
"""
