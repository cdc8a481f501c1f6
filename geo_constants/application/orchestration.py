from geo_constants.application.services.base import (
    BaseConfigReader,
    BaseReferenceDataset,
)
from geo_constants.application.services.list_builder import OrderedUniqueListBuilder
from geo_constants.application.services.resolver import ScalarDefaultResolver
from geo_constants.domain import constants as c
from geo_constants.domain.exceptions import ReferenceDataUnavailableError
from geo_constants.domain.models.constants import Constants
from geo_constants.domain.models.reference import ReferenceData
from geo_constants.domain.normalizers import (
    flatten_and_dedupe_sorted,
    sorted_uniq,
    title_case_all,
    to_upper_all,
)
from geo_constants.logging_config import get_logger

logger = get_logger(__name__)


def calling_codes_from(reference: ReferenceData) -> tuple[str, ...]:
    """Split each country's comma-joined calling codes into one sorted list."""
    codes = (
        code.strip()
        for country in reference.countries.values()
        for code in (country.phone or "").split(c.CALLING_CODE_SEPARATOR)
    )
    return to_upper_all(sorted_uniq(codes))


def map_feature_types(places, default_type: str) -> tuple[str, ...]:
    return title_case_all(flatten_and_dedupe_sorted(places, default_type))


class ConstantTableBuilder:
    """
    Derives the full set of constants in a fixed order.

    Combines the config reader overrides, the reference dataset and the
    hand-authored vocabularies from geo_constants.domain.constants.
    """

    def __init__(self, reader: BaseConfigReader, dataset: BaseReferenceDataset):
        self.reader = reader
        self.dataset = dataset
        self.resolver = ScalarDefaultResolver(reader)
        self.list_builder = OrderedUniqueListBuilder(reader)

    def _load_reference(self) -> ReferenceData:
        reference = self.dataset.load()
        for table in ("continents", "countries", "timezones"):
            if not getattr(reference, table):
                raise ReferenceDataUnavailableError(
                    f"Reference dataset table '{table}' is empty"
                )
        return reference

    def build(self) -> Constants:
        """
        Build the constants.

        Raises:
            ReferenceDataUnavailableError: If the reference dataset is missing
        """
        reference = self._load_reference()
        resolve = self.resolver.resolve
        build_list = self.list_builder.build

        default_locale = resolve(c.ENV_DEFAULT_LOCALE, c.DEFAULT_LOCALE)
        default_disaster_phase = resolve(
            c.ENV_DEFAULT_DISASTER_PHASE, c.DEFAULT_DISASTER_PHASE
        )
        map_feature_places = sorted_uniq(c.MAP_FEATURE_PLACES)

        constants = Constants(
            default_locale=default_locale,
            locales=build_list(c.ENV_LOCALES, default_locale),
            default_timezone=self.resolver.resolve_timezone(
                self.dataset.guess_timezone
            ),
            timezones=build_list(c.ENV_TIMEZONES, reference.timezones),
            default_date_format=resolve(
                c.ENV_DEFAULT_DATE_FORMAT, c.DEFAULT_DATE_FORMAT
            ),
            default_time_format=resolve(
                c.ENV_DEFAULT_TIME_FORMAT, c.DEFAULT_TIME_FORMAT
            ),
            default_datetime_format=resolve(
                c.ENV_DEFAULT_DATETIME_FORMAT, c.DEFAULT_DATETIME_FORMAT
            ),
            default_continent_name=resolve(
                c.ENV_DEFAULT_CONTINENT_NAME, c.DEFAULT_CONTINENT_NAME
            ),
            continent_names=sorted_uniq(reference.continents.values()),
            default_country_name=resolve(
                c.ENV_DEFAULT_COUNTRY_NAME, c.DEFAULT_COUNTRY_NAME
            ),
            country_names=sorted_uniq(
                country.name for country in reference.countries.values()
            ),
            default_country_code=resolve(
                c.ENV_DEFAULT_COUNTRY_CODE, c.DEFAULT_COUNTRY_CODE
            ),
            country_codes=to_upper_all(sorted_uniq(reference.countries.keys())),
            default_calling_code=resolve(
                c.ENV_DEFAULT_CALLING_CODE, c.DEFAULT_CALLING_CODE
            ),
            calling_codes=calling_codes_from(reference),
            default_city_name=resolve(c.ENV_DEFAULT_CITY_NAME, c.DEFAULT_CITY_NAME),
            map_feature_default_nature=c.MAP_FEATURE_DEFAULT_NATURE,
            map_feature_default_family=c.MAP_FEATURE_DEFAULT_FAMILY,
            map_feature_default_type=c.MAP_FEATURE_DEFAULT_TYPE,
            map_feature_natures=sorted_uniq(c.MAP_FEATURE_NATURES),
            map_feature_families=sorted_uniq(c.MAP_FEATURE_FAMILIES),
            map_feature_places=map_feature_places,
            map_feature_types=map_feature_types(
                map_feature_places, c.MAP_FEATURE_DEFAULT_TYPE
            ),
            default_disaster_phase=default_disaster_phase,
            disaster_phases=build_list(c.ENV_DISASTER_PHASES, c.DISASTER_PHASES),
        )

        logger.info(
            f"Constants built: {len(constants.locales)} locale(s), "
            f"{len(constants.timezones)} timezone(s), "
            f"{len(constants.country_codes)} countries, "
            f"default timezone {constants.default_timezone}"
        )
        return constants
