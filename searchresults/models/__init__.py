from searchresults.models.ms_run import MsRun
from searchresults.models.search import Search
from searchresults.models.spectrum import Identification, Spectrum

Record = Search | MsRun | Spectrum | Identification
