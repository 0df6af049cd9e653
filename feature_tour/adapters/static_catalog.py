"""Built-in showcase catalog.

The five topics of the Compose feature tour, in display order.
"""

from collections.abc import Sequence

from feature_tour.core.topics import Topic, validate_catalog

SHOWCASE_TOPICS: tuple[Topic, ...] = (
    Topic(
        id="composable-basics",
        title="Composable basics",
        summary="The @Composable function and the core ideas of declarative UI.",
        highlights=(
            "@Composable functions describe the screen instead of mutating views.",
            "The UI recomposes automatically when the state it reads changes.",
            "Previews let you inspect each component in isolation.",
        ),
        code_hint='@Composable\nfun Greeting(name: String) {\n    Text("Hello $name!")\n}',
    ),
    Topic(
        id="state-hoisting",
        title="State management and state hoisting",
        summary="Hoist state so composables stay stateless and easy to test.",
        highlights=(
            "Keep state with remember and mutableStateOf.",
            "Move state and event handling up to the caller for reuse.",
            "A ViewModel stores and shares state across screens.",
        ),
        code_hint=(
            'var query by rememberSaveable { mutableStateOf("") }\n'
            "SearchBar(query, onQueryChange = { query = it })"
        ),
    ),
    Topic(
        id="material3-layout",
        title="Material 3 layout and components",
        summary="Build a consistent Material 3 screen with Scaffold, TopAppBar and Card.",
        highlights=(
            "Scaffold provides slots for the top bar, bottom bar and FAB.",
            "MaterialTheme.typography and colorScheme keep the style consistent.",
            "Card and Button ship with mobile-friendly spacing and styling.",
        ),
        code_hint=(
            "Scaffold(\n"
            '    topBar = { SmallTopAppBar(title = { Text("Compose") }) }\n'
            ") { inner ->\n"
            "    Column(Modifier.padding(inner)) { /* content */ }\n"
            "}"
        ),
    ),
    Topic(
        id="navigation-compose",
        title="Navigation Compose",
        summary="Multi-screen navigation with NavHost, keeping state and the back stack.",
        highlights=(
            "rememberNavController() creates the navigation controller.",
            "NavHost tells screens apart by route; navController.navigate switches them.",
            "A shared ViewModel carries state between screens.",
        ),
        code_hint=(
            "val navController = rememberNavController()\n"
            'NavHost(navController, startDestination = "home") {\n'
            '    composable("home") { HomeScreen(onNavigate = { navController.navigate("detail") }) }\n'
            "}"
        ),
    ),
    Topic(
        id="mvvm-architecture",
        title="Compose and MVVM",
        summary="Expose UiState from a ViewModel for unidirectional, predictable UI.",
        highlights=(
            "The ViewModel owns the data source (repository) and business logic.",
            "UiState is exposed as StateFlow and observed with collectAsState().",
            "User intents flow to the ViewModel, keeping a single source of truth.",
        ),
        code_hint=(
            "class FeatureViewModel : ViewModel() {\n"
            "    private val _uiState = MutableStateFlow(FeatureUiState())\n"
            "    val uiState: StateFlow<FeatureUiState> = _uiState\n"
            "}"
        ),
    ),
)


class StaticTopicCatalog:
    """Catalog backed by the built-in showcase topics."""

    def __init__(self, topics: Sequence[Topic] = SHOWCASE_TOPICS) -> None:
        self._topics = validate_catalog(topics)

    def load_topics(self) -> tuple[Topic, ...]:
        return self._topics
