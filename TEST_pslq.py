# Plant an integer relation among random high precision values and time its recovery.
import logging
import random
import time
import mpmath
from pslq import pslq, Status
from num_funs import dot

logging.basicConfig(level=logging.INFO)

seed = time.time()
#seed = 1760870000.25
random.seed(seed)

dps = 60
n = 6 # number of values, the last one is the planted combination
maxc = 9 # planted coefficients are in [-maxc, maxc]
max_norm_bound = 10**6

mpmath.mp.dps = dps
x = [mpmath.mpf(random.random()) + mpmath.rand() for i in range(n-1)]
c = [random.randint(-maxc, maxc) for i in range(n-1)]
x.append(abs(dot(c, x)))
x.sort()

print("File: TEST_pslq.py")
print(time.ctime())
print("n=", n)
print("dps=", dps)
print("maxc=", maxc)
print("planted=", c)
print("\nseed=", seed)

p = pslq(x, max_norm_bound, disp=True)

stime = time.time()
relation = p.run()
dtime = time.time() - stime

print("\nSearch completed with status", p.status.name)
print("time = ", dtime)
print("iterations = ", p.iteration, "of expected", p.expected)
if p.status in (Status.OK, Status.RESIDUAL_TOO_LARGE):
  print("relation = ", [k for k, v in relation])
  print("residual = ", mpmath.nstr(sum(k*v for k, v in relation), 5))
print("final norm bound = ", mpmath.nstr(p.bounds[-1], 8) if p.bounds else None)

print("\n\nFinished at ", end="")
print(time.ctime())
