"""
Command Line Interface Package

Command Structure:
- cash-register: Main entry point with utility commands (version, config)
- cash-register change FILE: Calculate change for a file of transactions
- cash-register serve: Run the HTTP API
"""
