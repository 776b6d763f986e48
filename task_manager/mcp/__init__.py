"""
MCP (Model Context Protocol) Server Package

Exposes the project and task services to AI agents as MCP tools, a
tasks://{projectId} resource and a next-steps planning prompt.
"""
