COMPLETION = "GitHub pull requests"
