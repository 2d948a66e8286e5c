"""Revenue & dashboard overview schemas."""

from pydantic import BaseModel

from store_admin.schemas.common import CamelModel


class GraphData(BaseModel):
    name: str
    total: float


class StoreOverview(CamelModel):
    total_revenue: float
    sales_count: int
    stock_count: int
    graph_revenue: list[GraphData]
