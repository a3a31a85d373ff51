COMPLETION = "Switch proxy mode"
HELP = """Switch proxy mode

Switch between rule, direct and global mode.

Modes:
  rule    Traffic is routed by rules
  direct  All traffic goes direct
  global  All traffic goes through the proxy

Switching to rule mode opens the proxy picker."""
