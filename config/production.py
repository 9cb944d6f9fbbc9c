import os

DEBUG = False

CURRENCY = os.getenv("PAYROLL_CURRENCY", "Php")
