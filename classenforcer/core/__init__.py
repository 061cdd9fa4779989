"""
Core components of classenforcer (errors, enforcement engine).

No side effects on import.
"""
