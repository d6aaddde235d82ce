"""Pydantic schemas used across the project.

Field names are snake_case in Python and camelCase on the wire, which is the
shape the browser client and saved project files use.
"""
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from script_builder.domain.actions import ActionInstance, ActionTemplate
from script_builder.domain.projects import Project, ProjectVariable
from script_builder.modules.devices import AudioDevice, DisplayDevice, ToolStatusReport


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OperationResponse(CamelModel):
    success: bool = True


class ActionTemplateResponse(CamelModel):
    name: str
    category: str
    command: str
    description: str
    variables: list[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, template: ActionTemplate) -> "ActionTemplateResponse":
        return cls(
            name=template.name,
            category=template.category,
            command=template.command,
            description=template.description,
            variables=list(template.variables),
        )


class ActionInstanceSchema(CamelModel):
    action_name: str = Field(..., min_length=1)
    command: Optional[str] = None
    description: Optional[str] = None
    variables: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_domain(cls, instance: ActionInstance) -> "ActionInstanceSchema":
        return cls(
            action_name=instance.action_name,
            command=instance.command,
            description=instance.description,
            variables=dict(instance.variables),
        )


class AddScriptRequest(CamelModel):
    action: ActionInstanceSchema


class MoveScriptRequest(CamelModel):
    direction: Literal["up", "down"]


class ProjectVariableSchema(CamelModel):
    value: str
    description: str = ""

    @classmethod
    def from_domain(cls, variable: ProjectVariable) -> "ProjectVariableSchema":
        return cls(value=variable.value, description=variable.description)

    def to_domain(self) -> ProjectVariable:
        return ProjectVariable(value=self.value, description=self.description)


class VariableCreate(CamelModel):
    name: Optional[str] = None
    value: Optional[str] = None
    description: Optional[str] = ""


class ProjectResponse(CamelModel):
    name: str
    before_scripts: list[ActionInstanceSchema] = Field(default_factory=list)
    after_scripts: list[ActionInstanceSchema] = Field(default_factory=list)
    variables: dict[str, ProjectVariableSchema] = Field(default_factory=dict)

    @classmethod
    def from_domain(cls, project: Project) -> "ProjectResponse":
        return cls(
            name=project.name,
            before_scripts=[ActionInstanceSchema.from_domain(item) for item in project.before_scripts],
            after_scripts=[ActionInstanceSchema.from_domain(item) for item in project.after_scripts],
            variables={
                name: ProjectVariableSchema.from_domain(variable) for name, variable in project.variables.items()
            },
        )


class ProjectUpdate(CamelModel):
    """Partial project; only fields present in the request are applied."""

    name: Optional[str] = None
    before_scripts: Optional[list[ActionInstanceSchema]] = None
    after_scripts: Optional[list[ActionInstanceSchema]] = None
    variables: Optional[dict[str, ProjectVariableSchema]] = None


class ProjectMutationResponse(OperationResponse):
    project: ProjectResponse


class VariablesResponse(OperationResponse):
    variables: dict[str, ProjectVariableSchema]


class VariableOptionResponse(CamelModel):
    value: str
    label: str


class DisplayDeviceResponse(CamelModel):
    id: int
    device_id: str
    name: str
    device_path: str
    resolution: str
    is_primary: bool
    friendly_name: str
    display_name: str
    refresh_rate: Optional[int] = None

    @classmethod
    def from_domain(cls, display: DisplayDevice) -> "DisplayDeviceResponse":
        return cls(
            id=display.id,
            device_id=display.device_id,
            name=display.name,
            device_path=display.device_path,
            resolution=display.resolution,
            is_primary=display.is_primary,
            friendly_name=display.friendly_name,
            display_name=display.display_name,
            refresh_rate=display.refresh_rate,
        )


class AudioDeviceResponse(CamelModel):
    id: str
    index: str
    name: str
    is_default: bool
    friendly_name: str

    @classmethod
    def from_domain(cls, device: AudioDevice) -> "AudioDeviceResponse":
        return cls(
            id=device.id,
            index=device.index,
            name=device.name,
            is_default=device.is_default,
            friendly_name=device.friendly_name,
        )


class ToolStatusSchema(CamelModel):
    name: str
    filename: str
    description: str
    available: bool
    size: Optional[int] = None


class ToolSummary(CamelModel):
    total: int
    available: int
    missing: int


class ToolStatusResponse(CamelModel):
    summary: ToolSummary
    tools: list[ToolStatusSchema]

    @classmethod
    def from_domain(cls, report: ToolStatusReport) -> "ToolStatusResponse":
        return cls(
            summary=ToolSummary(total=report.total, available=report.available, missing=report.missing),
            tools=[
                ToolStatusSchema(
                    name=tool.name,
                    filename=tool.filename,
                    description=tool.description,
                    available=tool.available,
                    size=tool.size,
                )
                for tool in report.tools
            ],
        )


class ExportPreviewResponse(CamelModel):
    before_script: str
    after_script: str
    json_config: str


class ExportResponse(CamelModel):
    success: bool
    message: Optional[str] = None
    files: list[str] = Field(default_factory=list)
    error: Optional[str] = None
