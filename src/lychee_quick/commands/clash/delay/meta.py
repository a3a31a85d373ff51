COMPLETION = "Delay of the current proxy"
