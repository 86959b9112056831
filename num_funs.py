import math
import struct
import sys
import mpmath

def is_mp(x):
  ''' True if x is an mpmath arbitrary precision real '''
  return isinstance(x, mpmath.mpf)

def real_type(x):
  ''' the real type for the values x: mpf if any element is mpf, else float '''
  if any(is_mp(t) for t in x): return mpmath.mpf
  return float

def epsilon(x):
  ''' the machine epsilon for the type of x, mpf uses the current mpmath precision '''
  if is_mp(x): return mpmath.mp.eps
  return sys.float_info.epsilon

def sqrt(x):
  if is_mp(x): return mpmath.sqrt(x)
  return math.sqrt(x)

def exp(x):
  if is_mp(x): return mpmath.exp(x)
  return math.exp(x)

def log(x):
  ''' natural log as an mpf, so that bounds beyond the float range still work '''
  return mpmath.log(x)

def nint(t):
  ''' nearest integer of t, halves rounded away from zero '''
  if t > 0: return int(t + 0.5)
  return -int(0.5 - t)

def ulp_distance(a, b):
  ''' number of representable steps between a and b '''
  if is_mp(a) or is_mp(b):
    a, b = mpmath.mpf(a), mpmath.mpf(b)
    if a == b: return 0
    m = max(abs(a), abs(b))
    ulp = mpmath.ldexp(1, mpmath.mag(m) - mpmath.mp.prec) # one step at the larger magnitude
    return int(abs(a - b)/ulp)
  ia = _ordered_bits(float(a))
  ib = _ordered_bits(float(b))
  return abs(ia - ib)

def _ordered_bits(f):
  ''' the bits of a double as an integer that is monotone in f '''
  i = struct.unpack('<q', struct.pack('<d', f))[0]
  if i < 0: i = -(i & 0x7fffffffffffffff)
  return i

def gcd(n1, n2=None):
  ''' gcd(n1 [,n2]) if not n2 then n1 should be a list '''
  if n2==None:
    if isinstance(n1,list): # take a vector gcd if only one input of a list
      g=0
      for i in range(len(n1)):
        g=gcd(g,n1[i])
        if g==1: return 1 # cut the calculation short if no more can be calculated
      return g
    elif n1<0: return -n1
    else: return n1
  a,b=n1,n2
  if a<0: a=-a
  if b<0:b=-b
  elif b==0: return a
  while a!=0:
    c=b%a
    if c<a-c:a,b=c,a ## do min. path speedup
    else:a,b=a-c,a
  return b

def dot(list1, list2):
  n = min(len(list1), len(list2))
  return sum(x*y for x, y in zip(list1[:n], list2[:n]))
