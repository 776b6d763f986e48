"""
MCP Server Implementation

Registry of the tools, resource templates and prompts this service offers.
The registry is served through the MCP SDK's low-level Server, which owns
the protocol: handshake, framing, transports.
"""

from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional, Type
from dataclasses import dataclass
import logging

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from pydantic import AnyUrl, BaseModel, ValidationError

from task_manager import __version__
from task_manager.errors import InvalidInput, StoreUnavailable, TaskManagerError
from task_manager.mcp.base_tool import create_error_response, validation_errors

logger = logging.getLogger(__name__)

# MCP error code for an unknown resource URI
RESOURCE_NOT_FOUND = -32002


@dataclass
class MCPTool:
    """MCP Tool definition"""
    name: str
    title: str
    description: str
    input_model: Type[BaseModel]
    output_model: Optional[Type[BaseModel]]
    handler: Callable[[Dict[str, Any]], Awaitable[types.CallToolResult]]

    def definition(self) -> types.Tool:
        output_schema = None
        if self.output_model is not None:
            output_schema = self.output_model.model_json_schema(by_alias=True, mode="serialization")
        return types.Tool(
            name=self.name,
            title=self.title,
            description=self.description,
            inputSchema=self.input_model.model_json_schema(by_alias=True),
            outputSchema=output_schema,
        )


@dataclass
class MCPResourceTemplate:
    """Resource template such as tasks://{projectId}, served by URI scheme"""
    name: str
    title: str
    description: str
    uri_template: str
    handler: Callable[[str], Awaitable[List[ReadResourceContents]]]

    @property
    def scheme(self) -> str:
        return self.uri_template.split("://", 1)[0]

    def definition(self) -> types.ResourceTemplate:
        return types.ResourceTemplate(
            name=self.name,
            title=self.title,
            description=self.description,
            uriTemplate=self.uri_template,
            mimeType="text/plain",
        )


@dataclass
class MCPPrompt:
    """Prompt definition"""
    name: str
    title: str
    description: str
    input_model: Type[BaseModel]
    handler: Callable[[BaseModel], Awaitable[types.GetPromptResult]]

    def definition(self) -> types.Prompt:
        schema = self.input_model.model_json_schema(by_alias=True)
        required = set(schema.get("required", []))
        return types.Prompt(
            name=self.name,
            title=self.title,
            description=self.description,
            arguments=[
                types.PromptArgument(name=name, required=name in required)
                for name in schema.get("properties", {})
            ],
        )


def to_mcp_error(error: TaskManagerError) -> McpError:
    """Protocol error for failures outside tool calls."""
    code = types.INTERNAL_ERROR if isinstance(error, StoreUnavailable) else types.INVALID_PARAMS
    return McpError(types.ErrorData(
        code=code,
        message=error.message,
        data={"code": error.code, "details": error.details},
    ))


class MCPServer:
    """
    MCP Server for Project and Task Management

    Tools report domain failures inside their result (isError) so the model
    can see them; resources and prompts report them as protocol errors.
    """

    def __init__(self, name: str = "task-manager", instructions: Optional[str] = None):
        self.tools: Dict[str, MCPTool] = {}
        self.resource_templates: Dict[str, MCPResourceTemplate] = {}
        self.prompts: Dict[str, MCPPrompt] = {}
        self.name = name
        self.server = Server(name, version=__version__, instructions=instructions)
        self._install_handlers()
        logger.info(f"Initializing MCP Server: {self.name}")

    def register_tool(self, tool: MCPTool):
        """Register a tool with the MCP server"""
        if tool.name in self.tools:
            logger.warning(f"Tool {tool.name} already registered, overwriting")

        self.tools[tool.name] = tool
        logger.info(f"Registered MCP tool: {tool.name}")

    def register_resource_template(self, template: MCPResourceTemplate):
        self.resource_templates[template.scheme] = template
        logger.info(f"Registered MCP resource template: {template.uri_template}")

    def register_prompt(self, prompt: MCPPrompt):
        self.prompts[prompt.name] = prompt
        logger.info(f"Registered MCP prompt: {prompt.name}")

    def list_tools(self) -> List[str]:
        """List all registered tool names"""
        return list(self.tools.keys())

    async def invoke_tool(self, tool_name: str, arguments: Optional[Dict[str, Any]] = None) -> types.CallToolResult:
        """
        Invoke a tool with its arguments

        Returns:
            MCP tool result; domain errors and unknown tools come back as isError results
        """
        logger.info(f"Invoking MCP tool: {tool_name}")

        try:
            if tool_name not in self.tools:
                raise InvalidInput(
                    f"Tool {tool_name} not found. Available tools: {self.list_tools()}",
                    {"tool": tool_name}
                )
            result = await self.tools[tool_name].handler(arguments or {})
            logger.info(f"Tool {tool_name} executed successfully")
            return result
        except TaskManagerError as e:
            logger.warning(f"Tool {tool_name} failed: {e.code} {e.message}")
            return create_error_response(e)

    async def read_resource(self, uri: str) -> List[ReadResourceContents]:
        template = self.resource_templates.get(uri.split("://", 1)[0])
        if template is None:
            raise McpError(types.ErrorData(code=RESOURCE_NOT_FOUND, message="Resource not found", data={"uri": uri}))
        try:
            return await template.handler(uri)
        except TaskManagerError as e:
            raise to_mcp_error(e)

    async def get_prompt(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> types.GetPromptResult:
        if name not in self.prompts:
            raise McpError(types.ErrorData(code=types.INVALID_PARAMS, message=f"Prompt {name} not found"))
        prompt = self.prompts[name]
        try:
            try:
                params = prompt.input_model.model_validate(arguments or {})
            except ValidationError as e:
                raise InvalidInput(f"Invalid arguments for prompt {name}", {"errors": validation_errors(e)})
            return await prompt.handler(params)
        except TaskManagerError as e:
            raise to_mcp_error(e)

    async def run_stdio(self) -> None:
        """Serve over stdin/stdout until the client disconnects."""
        async with stdio_server() as (read_stream, write_stream):
            logger.info("MCP server (stdio) ready.")
            await self.server.run(read_stream, write_stream, self.server.create_initialization_options())

    def _install_handlers(self) -> None:
        server = self.server

        @server.list_tools()
        async def list_tools() -> List[types.Tool]:
            return [tool.definition() for tool in self.tools.values()]

        # Arguments are validated by each tool's pydantic model instead
        @server.call_tool(validate_input=False)
        async def call_tool(name: str, arguments: Dict[str, Any]) -> types.CallToolResult:
            return await self.invoke_tool(name, arguments)

        @server.list_resources()
        async def list_resources() -> List[types.Resource]:
            return []

        @server.list_resource_templates()
        async def list_resource_templates() -> List[types.ResourceTemplate]:
            return [template.definition() for template in self.resource_templates.values()]

        @server.read_resource()
        async def read_resource(uri: AnyUrl) -> Iterable[ReadResourceContents]:
            return await self.read_resource(str(uri))

        @server.list_prompts()
        async def list_prompts() -> List[types.Prompt]:
            return [prompt.definition() for prompt in self.prompts.values()]

        @server.get_prompt()
        async def get_prompt(name: str, arguments: Optional[Dict[str, str]]) -> types.GetPromptResult:
            return await self.get_prompt(name, arguments)
