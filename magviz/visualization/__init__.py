"""
Display helpers for corrected and raw point clouds
"""
