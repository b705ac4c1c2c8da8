class Config:
    """Global NetMSA alignment configuration."""

    ###############
    # ROW WEIGHTS
    ###############
    W1 = 0.25  #: weight multiplier for unaligned rows
    W2 = 0.5  #: weight multiplier for aligned rows containing gaps
    W3 = 1.0  #: weight of a full row

    ############
    # ENGINE
    ############
    MAX_ITERATIONS = 10000  #: maximum number of row evaluations
    #: number of rows after the current row scored by the objective.
    #: None scores every row down to the last one.
    WINDOW = None
    NEIGHBORHOOD = 3  #: max rows below the current row to search for the anchor
    #: sweeps without improvement after which a symbol is considered settled
    PARTICLE_STALL_LIMIT = 2
    N_JOBS = 1  #: processes used to evaluate candidate shifts

    ############
    # RENDERING
    ############
    GAP_CHAR = "-"  #: character used to render gaps
