from dataclasses import dataclass


@dataclass(frozen=True)
class MsRun:
    """An MS run and the ids of the spectra which are part of it.

    `search_uuid` refers to the search the run belongs to. Spectrum ids are expected to be unique within a run.
    """

    search_uuid: str
    ms_run_name: str
    spectra_ids: tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "spectra_ids", tuple(self.spectra_ids))

    @classmethod
    def empty(cls) -> "MsRun":
        return cls(search_uuid="", ms_run_name="")

    def has_spectrum(self, spectrum_id: str) -> bool:
        return spectrum_id in self.spectra_ids
