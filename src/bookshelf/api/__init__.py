"""
FastAPI application for Bookshelf
"""
