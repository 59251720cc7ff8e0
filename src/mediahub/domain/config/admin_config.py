"""Runtime admin configuration.

The admin config is a JSON document (see ``config/config.example.json``)
edited by operators. Field aliases follow the document's keys, Python
attribute names are snake_case.
"""

from pydantic import BaseModel, ConfigDict, Field

from mediahub.domain.search.value_objects import SourceDescriptor

DEFAULT_CLOUD_TYPES: tuple[str, ...] = ("baidu", "aliyun", "quark", "tianyi", "uc")


class _ConfigModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class SiteConfig(_ConfigModel):
    site_name: str = Field(default="MediaHub", alias="SiteName")
    search_max_pages: int = Field(default=5, ge=1, alias="SearchDownstreamMaxPage")
    cache_time_seconds: int = Field(default=7200, ge=0, alias="SiteInterfaceCacheTime")
    disable_content_filter: bool = Field(default=False, alias="DisableYellowFilter")


class UserTag(_ConfigModel):
    name: str
    enabled_apis: list[str] = Field(default_factory=list, alias="enabledApis")


class UserConfig(_ConfigModel):
    allow_register: bool = Field(default=True, alias="AllowRegister")
    tags: list[UserTag] = Field(default_factory=list, alias="Tags")

    def apis_for_tags(self, tag_names: list[str]) -> set[str]:
        """Union of the source keys enabled by the named tags."""
        apis: set[str] = set()
        for tag in self.tags:
            if tag.name in tag_names:
                apis.update(tag.enabled_apis)
        return apis


class SourceConfig(_ConfigModel):
    key: str
    name: str
    api: str
    detail: str | None = None
    disabled: bool = False

    def to_descriptor(self, timeout_seconds: float) -> SourceDescriptor:
        return SourceDescriptor(
            key=self.key,
            name=self.name,
            endpoint=self.api,
            detail=self.detail,
            timeout_seconds=timeout_seconds,
            enabled=not self.disabled,
        )


class NetDiskConfig(_ConfigModel):
    enabled: bool = False
    pansou_url: str = Field(default="", alias="pansouUrl")
    timeout_seconds: float = Field(default=30, gt=0, alias="timeout")
    enabled_cloud_types: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CLOUD_TYPES),
        alias="enabledCloudTypes",
    )


class YouTubeConfig(_ConfigModel):
    enabled: bool = False
    api_key: str = Field(default="", alias="apiKey")
    enable_demo: bool = Field(default=True, alias="enableDemo")
    max_results: int = Field(default=25, ge=1, alias="maxResults")
    enabled_regions: list[str] = Field(default_factory=list, alias="enabledRegions")
    enabled_categories: list[str] = Field(
        default_factory=list,
        alias="enabledCategories",
    )


class AdminConfig(_ConfigModel):
    """Root of the admin configuration document."""

    site: SiteConfig = Field(default_factory=SiteConfig, alias="SiteConfig")
    user: UserConfig = Field(default_factory=UserConfig, alias="UserConfig")
    sources: list[SourceConfig] = Field(default_factory=list, alias="SourceConfig")
    netdisk: NetDiskConfig = Field(default_factory=NetDiskConfig, alias="NetDiskConfig")
    youtube: YouTubeConfig = Field(default_factory=YouTubeConfig, alias="YouTubeConfig")
