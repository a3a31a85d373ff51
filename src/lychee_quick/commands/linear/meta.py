COMPLETION = "Linear issue workflow"
HELP = """Linear issue workflow

Environment:
  LINEAR_API_KEY             Linear personal API key
  LINEAR_TEAM                Team key whose issues are listed
  PREVIEWS_COMMENT_MENTIONS  Comma-separated emails mentioned in preview comments
  PREVIEWS_COMMENT_FOOTER    Footer of preview comments
  RELEASE_NOTE_PAGE          Page opened after a release note is copied"""
