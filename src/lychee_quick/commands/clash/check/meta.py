COMPLETION = "Check proxy chain and delay"
