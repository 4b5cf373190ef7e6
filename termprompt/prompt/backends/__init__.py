"""
module termprompt.prompt.backends

Contains all terminal integrations that implement the abstract terminal
driver, input source and key decoder classes
"""
