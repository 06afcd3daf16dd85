"""
Static datasets loaded by the reference data repository at start-up
"""
