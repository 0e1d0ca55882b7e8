# Domain layer: records and scoring engine
