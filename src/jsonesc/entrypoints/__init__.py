"""Entry points for jsonesc.

Front ends that drive the service layer; currently only the command-line
interface (`jsonesc.entrypoints.cli`).
"""
