COMPLETION = "Build a release note"
HELP = """Build a release note

Pick started or completed issues; a Markdown release note with their pull
requests is copied to the clipboard. RELEASE_NOTE_PAGE is opened afterwards
when set.

Options:
  -f  Refresh the cached issue list"""
