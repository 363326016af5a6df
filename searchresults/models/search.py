from dataclasses import dataclass


@dataclass(frozen=True)
class Search:
    """A search and the names of the MS runs which are part of it.

    Only the placeholder returned by `empty()` may lack a `search_uuid`,
    a search without uuid but with MS runs is rejected.
    """

    search_uuid: str
    ms_run_names: tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "ms_run_names", tuple(self.ms_run_names))

        if not self.search_uuid and self.ms_run_names:
            raise ValueError(
                f"Search with MS runs {list(self.ms_run_names)} requires a search_uuid"
            )

    @classmethod
    def empty(cls) -> "Search":
        return cls(search_uuid="")

    def is_empty(self) -> bool:
        return self == Search.empty()

    def has_ms_run(self, ms_run_name: str) -> bool:
        return ms_run_name in self.ms_run_names
