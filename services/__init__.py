"""
services/ - Business Logic Layer
=================================
Services validate input, call repositories, and decide the outcome of each
operation. They know nothing about HTTP.
"""
