"""
UNiDBox wholesale ordering backend
"""
