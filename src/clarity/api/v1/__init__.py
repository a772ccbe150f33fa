"""API version 1 routes."""

from fastapi import APIRouter

from clarity.api.v1 import budgets, daily_presets, insights, transactions

router = APIRouter(prefix="/api/v1")

# Include routers
router.include_router(transactions.router)
router.include_router(budgets.router)
router.include_router(daily_presets.router)
router.include_router(insights.router)
