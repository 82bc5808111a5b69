"""
Training glue between the generic model lifecycle and LightGBM.

------------------------------------------------------------
Lifecycle
------------------------------------------------------------

    scheme_X = transformer_X.fit(X_df)            # which columns, which codes
    X        = transformer_X.transform(scheme_X, X_df)
    cache    = model.setup(X, y, scheme_X)        # owned arrays + cat indices
    result   = model.fit(cache)                   # TrainResult
    yhat     = model.predict(result.predictor, X)

SupervisedMachine (training/machine.py) runs exactly this sequence.

------------------------------------------------------------
Semantics owned here
------------------------------------------------------------

- Validation split: order-preserving; first round(n * (1 - f)) rows train,
  the rest validate. No shuffling.
- Seeds: feature_fraction_seed / bagging_seed / data_random_seed left at 0
  are drawn from the model's seed source, on a parameter snapshot only.
- Threads: parallel=False pins num_threads to 1.
- Errors from the engine propagate unchanged. No retries.

Everything else (binning, trees, metrics) belongs to the engine.
"""
