"""Gym Face Attendance package.

Feature modules (emotions, members, attendance, recognition, checkin) with a
thin Flask controller layer over service/repository layers.
"""
