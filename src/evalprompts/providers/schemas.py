"""
Provider descriptor schema.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProviderOptions(BaseModel):
    """
    Inline provider descriptor, or the value side of an alias map entry.
    """

    model_config = ConfigDict(extra="allow")

    id: Optional[str] = Field(default=None, description="Provider identifier, e.g. 'openai:gpt-4o'")
    label: Optional[str] = Field(default=None, description="Display name; also registered as a lookup key")
    prompts: Optional[List[str]] = Field(
        default=None, description="Labels of the prompts this provider receives; all prompts when omitted"
    )
    config: Dict[str, Any] = Field(default_factory=dict, description="Provider-specific settings")
