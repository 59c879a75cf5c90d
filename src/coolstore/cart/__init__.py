"""Cart domain — add-to-cart request and command handlers."""
