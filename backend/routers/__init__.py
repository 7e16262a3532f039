"""
NPV Sweep API Routers

Each module in this package defines a FastAPI APIRouter for one endpoint
group (single-rate NPV engine, discount-rate sweep).
Routers are included in the main FastAPI app in main.py.
"""
