COMPLETION = "Mihomo/Clash proxy management"
HELP = """Mihomo/Clash proxy management

Inspect the proxy chain, switch proxies and modes, and run delay tests.

Environment:
  MIHOMO_URL        Mihomo external controller URL
  MIHOMO_TOKEN      Mihomo external controller secret
  MIHOMO_TOP_PROXY  Selector group the proxy chain starts from
  MIHOMO_BOARD      Web dashboard URL"""
