"""Employee Directory package.

This package is organized by feature modules (employees, salaries, auth)
with a thin Flask controller layer and service/repository layers underneath.
"""
