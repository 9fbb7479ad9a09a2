# app/routes_report.py
"""
Report endpoints: weekly totals and the per-category breakdown.
"""

from typing import List

from fastapi import APIRouter, Depends

from app.deps import get_report_engine
from app.schemas import BreakdownRow, WeeklyRow
from app.services.reports import ReportEngine

router = APIRouter(prefix="/report", tags=["report"])


@router.get("/weekly", response_model=List[WeeklyRow])
def weekly_report(engine: ReportEngine = Depends(get_report_engine)):
    """
    Credit, debit and balance per week (weeks start on Monday), oldest week first.
    """
    return engine.weekly_report()


@router.get("/breakdown", response_model=List[BreakdownRow])
def breakdown_report(engine: ReportEngine = Depends(get_report_engine)):
    """
    Summed amount per (type, category).
    """
    return engine.breakdown_report()
