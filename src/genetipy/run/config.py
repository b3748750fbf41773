import configparser
import os

class Config:

    # Fields that must never be negative
    _NON_NEGATIVE = ('population_size', 'max_generations', 'mutation_chance', 'n_batches',
                     'num_inputs', 'num_outputs', 'max_depth', 'weight_mutate_prob',
                     'connection_add_probability', 'node_add_probability',
                     'distance_excess_coeff', 'distance_disjoint_coeff', 'distance_params_coeff',
                     'distance_min_genes', 'similarity_threshold',
                     'fitness_scale', 'fitness_exponent')

    # Fields that are probabilities
    _PROBABILITIES = ('mutation_chance', 'weight_mutate_prob',
                      'connection_add_probability', 'node_add_probability')

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a Config holding default values.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a default Config for manual attribute setting.

        Raises:
            FileNotFoundError: If 'config_file' does not exist
            ValueError:        If a value is negative or a probability lies outside [0, 1]
        """

        # Default config for testing/manual setup
        if config_file is None:

            # Set defaults for the solver
            self.population_size = 100
            self.max_generations = 100
            self.mutation_chance = 0.05
            self.n_batches       = 1
            self.speciation      = False
            self.verbose         = False

            # Set defaults for the network
            self.num_inputs  = None
            self.num_outputs = None
            self.max_depth   = 20

            # Set defaults for connections
            self.min_weight         = -1.0
            self.max_weight         = 1.0
            self.weight_mutate_prob = 0.10

            # Set defaults for structural mutations
            self.connection_add_probability = 0.30
            self.node_add_probability       = 0.05

            # Set defaults for speciation
            self.distance_excess_coeff   = 1.0
            self.distance_disjoint_coeff = 1.0
            self.distance_params_coeff   = 0.4
            self.distance_min_genes      = 20
            self.similarity_threshold    = 0.3

            # Set defaults for fitness
            self.fitness_scale    = 10000.0
            self.fitness_exponent = 2.0

            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise

        # [SOLVER]

        # The number of members in each generation. Must be greater than zero.
        self.population_size = get_value('SOLVER', 'population_size', int)

        # The number of generations to simulate. The best member
        # of the last generation is the result of the run.
        self.max_generations = get_value('SOLVER', 'max_generations', int)

        # The probability that a newly bred child is mutated.
        self.mutation_chance = get_value('SOLVER', 'mutation_chance', float)

        # The population is split into this many batches, each batch being
        # handled by a separate worker. Clamped to [1, population_size].
        self.n_batches = get_value('SOLVER', 'n_batches', int, default=1)

        # Whether to compute the distance between each pair of members at the
        # start of each generation (required by the NEAT adjusted fitness).
        self.speciation = get_value('SOLVER', 'speciation', bool, default=False)

        # Whether to report the progress of the run on standard output.
        self.verbose = get_value('SOLVER', 'verbose', bool, default=False)

        # [NETWORK]

        # The number of input nodes, through which the network receives inputs.
        self.num_inputs = get_value('NETWORK', 'num_inputs', int, default=None)

        # The number of output nodes, to which the network delivers outputs.
        self.num_outputs = get_value('NETWORK', 'num_outputs', int, default=None)

        # The layer of the output nodes. Input nodes sit on layer 0 and
        # hidden nodes on the layers in between.
        self.max_depth = get_value('NETWORK', 'max_depth', int, default=20)

        # [CONNECTION]

        # The range from which new connection weights are drawn uniformly.
        self.min_weight = get_value('CONNECTION', 'min_weight', float, default=-1.0)
        self.max_weight = get_value('CONNECTION', 'max_weight', float, default=1.0)

        # The probability, per connection, that a weight mutation
        # replaces its weight with a newly chosen random value.
        self.weight_mutate_prob = get_value('CONNECTION', 'weight_mutate_prob', float, default=0.10)

        # [STRUCTURAL_MUTATIONS]

        # A mutation is exactly one of: add a connection, add a node, mutate the weights.
        # The first two happen with the probabilities below, weight mutation otherwise.
        self.connection_add_probability = \
            get_value('STRUCTURAL_MUTATIONS', 'connection_add_probability', float, default=0.30)
        self.node_add_probability = \
            get_value('STRUCTURAL_MUTATIONS', 'node_add_probability', float, default=0.05)

        # [SPECIATION]

        # The coefficients for the excess gene count, the disjoint gene count
        # and the average weight difference in the genomic distance.
        self.distance_excess_coeff   = get_value('SPECIATION', 'distance_excess_coeff'  , float, default=1.0)
        self.distance_disjoint_coeff = get_value('SPECIATION', 'distance_disjoint_coeff', float, default=1.0)
        self.distance_params_coeff   = get_value('SPECIATION', 'distance_params_coeff'  , float, default=0.4)

        # Genomes with fewer connection genes than this are not normalized
        # by their size, so that small genomes are not over-penalized.
        self.distance_min_genes = get_value('SPECIATION', 'distance_min_genes', int, default=20)

        # Genomes closer than this are counted as similar; the
        # fitness of a genome is divided by its number of similar genomes.
        self.similarity_threshold = get_value('SPECIATION', 'similarity_threshold', float, default=0.3)

        # [FITNESS]

        # fitness = scale * sum(|num_outputs - error| ** exponent) / number of similar genomes
        self.fitness_scale    = get_value('FITNESS', 'fitness_scale'   , float, default=10000.0)
        self.fitness_exponent = get_value('FITNESS', 'fitness_exponent', float, default=2.0)

        self.validate()

    def validate(self) -> None:
        """
        Check that no value is negative and that probabilities lie in [0, 1].

        Raises:
            ValueError: describing the first offending value
        """
        for name in self._NON_NEGATIVE:
            value = getattr(self, name, None)
            if value is not None and value < 0:
                raise ValueError(f"'{name}' must be non-negative, got {value}")

        for name in self._PROBABILITIES:
            value = getattr(self, name, None)
            if value is not None and value > 1:
                raise ValueError(f"'{name}' must lie in [0, 1], got {value}")

        if self.min_weight > self.max_weight:
            raise ValueError(f"'min_weight' ({self.min_weight}) exceeds 'max_weight' ({self.max_weight})")
