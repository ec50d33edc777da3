from typing import Annotated

from fastapi import Depends, Request

from app.services.hotel_search import HotelSearchService
from app.services.spreadsheet import SpreadsheetExporter


def get_hotel_search_service(request: Request) -> HotelSearchService:
    return request.app.state.hotel_search_service


def get_exporter(request: Request) -> SpreadsheetExporter:
    return request.app.state.exporter


HotelSearchDep = Annotated[HotelSearchService, Depends(get_hotel_search_service)]
ExporterDep = Annotated[SpreadsheetExporter, Depends(get_exporter)]
