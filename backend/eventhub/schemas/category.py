from pydantic import BaseModel


class CategoryResponse(BaseModel):
    id: str
    name: str
    description: str

    model_config = {"from_attributes": True}
