"""
Circle Warriors game package.
"""
