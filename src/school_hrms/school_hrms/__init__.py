"""School HRMS package.

This package is organized by feature modules (directory, family, onboarding, ...)
with a thin Flask controller layer and service/repository layers underneath.
"""
