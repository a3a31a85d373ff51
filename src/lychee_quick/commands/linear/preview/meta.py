COMPLETION = "Send preview links to an issue"
HELP = """Send preview links to an issue

Pick a pull request attached to a Linear issue, choose its preview links,
and post them as a comment mentioning PREVIEWS_COMMENT_MENTIONS.

Options:
  -f  Refresh the cached issue list"""
