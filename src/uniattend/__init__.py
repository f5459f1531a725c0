"""UniAttend package.

Shared attendance-code tracker for a multi-week academic calendar. Organized
by feature modules (attendance, schedules, sync) with a thin Flask controller
layer over service/repository layers.
"""
