from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

class FormattedArgs(BaseModel):
    """Flattened argv (without the program name) plus control keys taken from the first option."""
    model_config = ConfigDict(populate_by_name=True)

    args: List[str] = Field(default_factory=list, description="Ordered argument tokens")
    cwd: Optional[str] = None
    print_command: Optional[bool] = Field(None, alias="printCommand")
    quiet: Optional[bool] = None

    def command_line(self, program: str) -> str:
        return f"{program} {' '.join(self.args)}"
