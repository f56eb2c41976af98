"""Staffing Service - employee to task matching and team assembly."""
