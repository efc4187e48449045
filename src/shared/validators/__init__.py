"""Shared validators package for the application.

This package contains the form validation rules used by the login and
sign-up flows. Every validator returns ``None`` when the value is valid and
a human-readable message otherwise; none of them raise on bad input.

Available validators:
- name.py: Full name validation
- username.py: Username format validation
- email.py: Email format validation
- phone.py: Phone number (country code) validation
- password.py: Password strength and confirmation validation
- forms.py: Whole-form validation for login and sign-up
"""
