COMPLETION = "Personal development workflow CLI"
HELP = """Lychee Quick - personal development workflow CLI

Linear issues, Vercel deployments, GitHub pull requests and Mihomo proxies
from one terminal command.

Commands:
  clash   - Mihomo/Clash proxy management
  git     - GitHub pull requests
  linear  - Linear issue workflow
  vercel  - Vercel deployments

Options:
  -h, --help   Show help
  -f, --force  Refresh cached API responses

Examples:
  <cli> clash now        Show the current proxy chain
  <cli> linear branch    Create a branch from an issue
  <cli> vercel release   Trigger Vercel deploy hooks
  <cli> c-n              Alias of "clash now" (unique prefixes joined by "-")

Run '<cli> <command> -h' for help on a command."""
