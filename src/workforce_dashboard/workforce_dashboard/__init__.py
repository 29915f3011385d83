"""Workforce Dashboard package.

Feature modules (areas, employees, shifts, leaves, ...) describe their entity and
plug into the generic ``resources`` layer, which owns listing, dialogs and the
table adapters. Flask controllers stay thin.
"""
