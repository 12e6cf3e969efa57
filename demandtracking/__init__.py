"""Status and field-visibility rules for demands and their documents."""
