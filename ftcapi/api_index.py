"""
The API index served at the server root: version info and current season.
"""
from dataclasses import dataclass
from typing import Any, Optional

from ftcapi.records import expect_dict, get_int, get_opt_str, get_str


@dataclass
class ApiIndex:
    name: str = ""
    api_version: str = ""
    # "Mainifest" is how the server spells it.
    service_mainifest_name: Optional[str] = None
    service_mainifest_version: Optional[str] = None
    code_package_name: str = ""
    code_package_version: str = ""
    status: str = ""
    current_season: int = 0
    max_season: int = 0


def parse_api_index(data: Any) -> ApiIndex:
    d = expect_dict(data, "API index")
    return ApiIndex(
        name=get_str(d, "name"),
        api_version=get_str(d, "apiVersion"),
        service_mainifest_name=get_opt_str(d, "serviceMainifestName"),
        service_mainifest_version=get_opt_str(d, "serviceMainifestVersion"),
        code_package_name=get_str(d, "codePackageName"),
        code_package_version=get_str(d, "codePackageVersion"),
        status=get_str(d, "status"),
        current_season=get_int(d, "currentSeason"),
        max_season=get_int(d, "maxSeason"),
    )
