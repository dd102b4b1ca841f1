# Period parameters of the reference implementations mt19937ar.c and mt19937-64.c

# 32-bit Mersenne Twister
MT32_N = 624
MT32_M = 397
MT32_MATRIX_A = 0x9908B0DF        # constant vector a
MT32_UPPER_MASK = 0x80000000      # most significant w-r bits
MT32_LOWER_MASK = 0x7FFFFFFF      # least significant r bits
MT32_INIT_MULTIPLIER = 1812433253
MT32_INIT_SHIFT = 30
MT32_ARRAY_MULTIPLIER_1 = 1664525
MT32_ARRAY_MULTIPLIER_2 = 1566083941

# 64-bit Mersenne Twister
MT64_N = 312
MT64_M = 156
MT64_MATRIX_A = 0xB5026F5AA96619E9
MT64_UPPER_MASK = 0xFFFFFFFF80000000  # most significant 33 bits
MT64_LOWER_MASK = 0x7FFFFFFF          # least significant 31 bits
MT64_INIT_MULTIPLIER = 6364136223846793005
MT64_INIT_SHIFT = 62
MT64_ARRAY_MULTIPLIER_1 = 3935559000370003845
MT64_ARRAY_MULTIPLIER_2 = 2862933555777941757
