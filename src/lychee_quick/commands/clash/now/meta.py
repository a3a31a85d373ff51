COMPLETION = "Current proxy status"
HELP = """Current proxy status

Shows the current proxy chain and its delay.

- Offers to switch to rule mode when another mode is active
- Opens the proxy picker when the last proxy is dead
- Otherwise asks whether to switch to another proxy"""
