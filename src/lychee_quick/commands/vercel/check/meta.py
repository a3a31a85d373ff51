COMPLETION = "Deployments of a pull request branch"
