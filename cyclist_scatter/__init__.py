"""
Core package for the cyclist doping scatter plot application.

Submodules provide data loading, record normalization, scale computation,
and user interface rendering helpers that are orchestrated by the
top-level `app.py`.
"""
