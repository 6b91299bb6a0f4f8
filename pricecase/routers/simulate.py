from fastapi import APIRouter

from pricecase.schemas.metrics import ClientMetrics, ReconcileRequest
from pricecase.schemas.projection import (
    BusinessCaseRequest,
    BusinessCaseResponse,
    ProjectRequest,
    ProjectionResult,
)
from pricecase.services.business_case import build_business_case
from pricecase.services.projection import project
from pricecase.services.reconciler import reconcile

router = APIRouter(prefix="/simulate", tags=["simulate"])


@router.post("/reconcile", response_model=ClientMetrics)
async def reconcile_metrics(req: ReconcileRequest):
    return reconcile(req.current, req.edited_field, req.new_value)


@router.post("/project", response_model=ProjectionResult)
async def project_business_case(req: ProjectRequest):
    return project(req.metrics, req.pricing, req.options)


@router.post("/business-case", response_model=BusinessCaseResponse)
async def business_case(req: BusinessCaseRequest):
    return build_business_case(req)
