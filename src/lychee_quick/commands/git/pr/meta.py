COMPLETION = "List open pull requests"
