import os

# Startup diagnostics ([payroll-system] ...) before the menu
DEBUG = bool(int(os.getenv("DEBUG", "0")))

# Label printed in front of every amount in the payroll report
CURRENCY = os.getenv("PAYROLL_CURRENCY", "Php")
