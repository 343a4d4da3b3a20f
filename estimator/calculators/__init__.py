"""
Wall takeoff: deterministic geometry.

Given a wall's type, length, height and sub-option, derive raw material
counts (bricks, cement, sand, boards, sheets, channels, glass area).
Pure math, no state.
"""
