"""Constants and defaults.

Note: Keep operator-facing text here to avoid string literals spread across code.
"""

DEFAULT_CURRENCY = "Php"

# Largest count a prompt accepts (signed 32-bit range)
MAX_POSITIVE_INT = 2**31 - 1

REPORT_HEADER = "--- Employee Payroll Report ---"
MENU_TITLE = "Menu"
EXIT_NOTICE = "Exiting..."

PROMPT_ID = "Enter ID: "
PROMPT_NAME = "Enter Name: "
PROMPT_SALARY = "Enter Salary: "
PROMPT_HOURLY_WAGE = "Enter Hourly Wage: "
PROMPT_HOURS_WORKED = "Enter Hours Worked: "
PROMPT_PAYMENT_PER_PROJECT = "Enter Payment Per Project: "
PROMPT_PROJECTS_COMPLETED = "Enter Projects Completed: "
PROMPT_CHOICE = "Enter your choice: "

MSG_EMPTY_INPUT = "Invalid input. Please enter a non-empty value."
MSG_INVALID_NAME = "Invalid input. Name should contain only alphabetic characters."
MSG_INVALID_NUMBER = "Invalid input. Please enter a valid number."
MSG_INVALID_POSITIVE_INT = "Invalid input. Please enter a positive integer."
MSG_DUPLICATE_ID_RETRY = "Duplicate ID! Please enter another ID."
MSG_DUPLICATE_ID = "Duplicate ID!"
MSG_INVALID_CHOICE = "Invalid choice. Please try again."
