COMPLETION = "Vercel deployments"
HELP = """Vercel deployments

Environment:
  VERCEL_PERSONAL_TOKEN  Vercel personal access token
  VERCEL_TEAM            Vercel team id or slug
  GIT_TOKEN              GitHub token (branch list of "check")
  GIT_ORGANIZATION       GitHub organization
  GIT_REPO               GitHub repository"""
