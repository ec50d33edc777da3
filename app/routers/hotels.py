import asyncio
import logging

from fastapi import APIRouter, BackgroundTasks
from fastapi.responses import FileResponse

from app.dependencies import ExporterDep, HotelSearchDep
from app.services.spreadsheet import export_filename

logger = logging.getLogger(__name__)

router = APIRouter()

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@router.get("/fetch_hotels/{city}", response_class=FileResponse)
async def fetch_hotels(
    city: str,
    service: HotelSearchDep,
    exporter: ExporterDep,
    background_tasks: BackgroundTasks,
) -> FileResponse:
    hotels = await service.run(city)
    # openpyxl writes synchronously
    path = await asyncio.to_thread(exporter.write, city, hotels)
    logger.info("Request processing complete for city: %s", city)

    # Runs after the file has been streamed to the client
    background_tasks.add_task(exporter.remove, path)
    return FileResponse(
        path,
        media_type=XLSX_MEDIA_TYPE,
        filename=export_filename(city),
    )
