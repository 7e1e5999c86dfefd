from fastapi import APIRouter, Depends

from rentdrive.entrypoints.http.dependencies import get_catalog_facets_use_case
from rentdrive.entrypoints.http.dtos.catalog_facets import CatalogFacetsResponseDTO
from rentdrive.entrypoints.http.mappers.vehicle_mapper import VehicleMapper
from rentdrive.use_cases.get_catalog_facets import GetCatalogFacets


router = APIRouter(tags=["Catalog"])


@router.get(
    "/catalog/facets",
    response_model=CatalogFacetsResponseDTO,
    summary="Filter facets",
    description="""
    Values for the catalog filter controls.

    - vehicle_classes: in display priority order (MPV, SUV, Sedan)
    - capacities: distinct seat counts in the inventory, ascending
    - price: slider domain and step for the daily rate range
    """,
)
def get_catalog_facets(
    use_case: GetCatalogFacets = Depends(get_catalog_facets_use_case),
) -> CatalogFacetsResponseDTO:
    return VehicleMapper.to_facets_response(use_case.execute())
