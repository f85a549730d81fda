from pydantic import BaseModel, Field

class ColorAnalyzeRequest(BaseModel):
    color_input: str = Field(
        ...,
        min_length=1,
        max_length=256,
        description="The color to analyze (e.g. '#FF5733', 'rgba(0, 0, 0, 0.5)', 'oklch(0.7 0.1 200)', 'red')",
    )
