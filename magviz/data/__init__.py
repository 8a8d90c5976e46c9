"""
Sample file I/O and synthetic point clouds
"""
