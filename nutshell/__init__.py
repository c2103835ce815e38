"""
In a Nutshell core package.

Modules
───────
errors    — error kinds (TopicValidationError, ConfigurationError, ServiceError)
models    — Pydantic data models (ParsedSections, RankedItem, ParsedReply, NutshellResult)
gate      — topic validation
prompts   — system prompt + message pair
client    — Claude completion client
parser    — section / ranked-item parser
pipeline  — topic → parsed reply
"""
