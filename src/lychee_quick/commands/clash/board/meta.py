COMPLETION = "Open the Mihomo web board"
HELP = """Open the Mihomo web board

Runs a delay test on the GLOBAL group, then opens MIHOMO_BOARD with the
controller host, port and secret filled in."""
