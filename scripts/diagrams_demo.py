from simple_beam.domain.beam import BeamSpec, Units
from simple_beam.domain.loads import MomentLoad, UDLLoad, UVLLoad
from simple_beam.domain.supports import Fixed
from simple_beam.engine.analysis import analyze
from simple_beam.engine.sampling import sample_moment, sample_shear

beam = BeamSpec(length=6000, units=Units("mm", "kN"))

loads = [
    UDLLoad(label="W1", a=0, b=3000, w=0.002),           # kN/mm, down+
    UVLLoad(label="V1", a=3000, b=6000, w1=0.0, w2=0.004),
    MomentLoad(label="M1", x=4500, M=500),                # kN·mm, CCW+
]

res = analyze(beam, Fixed(side="left"), loads)
print("valido =", res.is_valid, res.error or "")
for r in res.reactions:
    print(r)
for s in res.moment_segments:
    print(f"[{s.a:g}, {s.b:g}] {s.kind}: M_a={s.value_a:g} M_b={s.value_b:g}")

V = sample_shear(res)
M = sample_moment(res)
print("puntos V:", len(V), " puntos M:", len(M))
print("M(0) =", M[0, 1], " M(L) =", M[-1, 1])
