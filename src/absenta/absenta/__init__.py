"""ABSENTA package.

School attendance backend organized by feature modules (admins, attendance,
reports, dashboard) with a thin Flask controller layer over service and
repository layers.
"""
