from .production import Production
from .dependencies import Dependencies, MissingProductionError, NoRootProductionError
from .grammar import Grammar, ProductionNotFoundError
from .root import Root, ResolutionOption, DuplicateDefinitionError
from .vocabulary import Vocabulary
