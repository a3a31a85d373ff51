COMPLETION = "Trigger deploy hooks"
HELP = """Trigger deploy hooks

Pick a branch with deploy hooks, then the projects to deploy. The hooks
are triggered together and the deployments dashboard is opened.

Options:
  -f  Refresh the cached project list"""
